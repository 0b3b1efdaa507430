""" pdalib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import pdalib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=pdalib.name,
    version=pdalib.__version__,
    license=pdalib.__license__,
    author=pdalib.__author__,
    author_email=pdalib.__author_email__,
    description="A library for program derived addresses",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"pdalib": ["_data/*.json"]},
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "solana program-derived-address pda ed25519 base58 "
        "associated-token-account"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
