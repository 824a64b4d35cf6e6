""" ecjacobi build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecjacobi

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecjacobi.name,
    version=ecjacobi.__version__,
    license=ecjacobi.__license__,
    author=ecjacobi.__author__,
    author_email=ecjacobi.__author_email__,
    description="Elliptic curve point arithmetic in Jacobian coordinates",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecjacobi": ["ecc/_data/*.json"]},
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves jacobian-coordinates "
        "scalar-multiplication secp256k1 secp256r1 secp384r1"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
