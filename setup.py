import os

from setuptools import setup


def read_version():
    version_file_path = os.path.join(os.path.dirname(__file__), "bimap", "version.txt")
    with open(version_file_path, "r") as f:
        return f.read().strip()


setup(
    name="bimap",
    version=read_version(),
    description="one-to-one mapping with constant time lookup by key and by value",
    packages=["bimap", "bimap.utility", "bimap.utility.logging"],
    python_requires=">=3.8",
    install_requires=[],
    zip_safe=False,
    package_data={"bimap": ["version.txt"]},
)
