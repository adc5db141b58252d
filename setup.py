from setuptools import setup, find_packages

setup(
    name="interplab",
    version="0.1.0",
    description="Numerical core of an interpolation and numerical-methods testbed",
    author="adamfilli",
    packages=find_packages(include=["interplab", "interplab.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
