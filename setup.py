from setuptools import setup, find_packages

setup(
    name="slidingstats",
    version="0.1.0",
    description="Incremental moving median and least squares moving average over sliding windows",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    include_package_data=True,
    python_requires=">=3.13",
)
