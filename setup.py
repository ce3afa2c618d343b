import os
from setuptools import setup, find_packages

with open(os.path.join("wktio", "VERSION")) as version_file:
    version = version_file.read().strip()

setup(
    name="wktio",
    version=version,
    description="Read and write geometries as well-known text (WKT)",
    license="GPLv2 with linking exception",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"wktio": ["VERSION"]},
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=[
        "click",
        "Pygments",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
