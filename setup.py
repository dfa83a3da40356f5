""" koblitz build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import koblitz

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=koblitz.name,
    version=koblitz.__version__,
    license=koblitz.__license__,
    author=koblitz.__author__,
    author_email=koblitz.__author_email__,
    description="Point arithmetic for the SEC 2 Koblitz elliptic curves",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={"test": ["pytest>=6.2"]},
    keywords=(
        "elliptic-curves koblitz secp256k1 secp224k1 secp192k1 secp160k1 "
        "jacobian-coordinates point-compression tonelli-shanks"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
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
