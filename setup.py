import setuptools

setuptools.setup(
    name="spatial",
    version="0.1.0",
    python_requires=">=3.6",
    install_requires=[
        "numpy",
        "pyyaml",
        "schematics",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "pytest-xdist",
        ],
        "dev": [
            "pylint",
            "pytype",
            "yapf",
        ],
    },
    packages=setuptools.find_packages(),
)
