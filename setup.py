from setuptools import setup, find_packages

setup(
    name="keyed-sets",
    version="0.1.0",
    description="Union, intersection and differences of sets keyed by a derived identity",
    author="adamfilli",
    packages=find_packages(include=["keyedsets", "keyedsets.*"]),
    install_requires=[
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.13",
)
