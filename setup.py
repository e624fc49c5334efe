import os
import re
import sys
from setuptools import setup, find_namespace_packages

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "VERSION"), "r", encoding="utf-8") as inputStream:
    version = inputStream.read().strip()

versionPattern = re.compile(
    r"v(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)(-(?P<status>[a-zA-Z0-9]+))?$"
)
versionMatch = versionPattern.match(version)

if versionMatch is None:
    print(
        "Invalid version format for the setup script: \x1b[1;31m{}\x1b[0m".format(version)
    )
    sys.exit(1)

if versionMatch.group("status") is not None:
    print(
        "Current version has the following status: \x1b[1;31m{}\x1b[0m".format(
            versionMatch.group("status")
        )
    )
    sys.exit(1)

usedVersion = "{}.{}.{}".format(
    versionMatch.group("major"),
    versionMatch.group("minor"),
    versionMatch.group("patch"),
)

setup(
    name="llparsing4py",
    version=usedVersion,
    packages=find_namespace_packages(
        "subprojects/llparsing4py/src/python", include=["llparsing4py*"]
    ),
    package_dir={"": "subprojects/llparsing4py/src/python"},
    python_requires=">=3.9",
    install_requires=["typing_extensions>=4.0"],
    extras_require={"test": ["pytest>=7.0"]},
)
