class GeometryError(Exception):
    """
    Raised when a geometry type is called with arguments it cannot interpret,
    e.g. a vector without exactly three components or an unknown corner name.
    Numeric values themselves are never rejected.
    """

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return repr(self.value)
