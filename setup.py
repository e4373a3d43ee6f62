"""
Create tin-validator as a Python package
"""

import io
import sys
import re

from setuptools import setup, find_packages

PKGNAME = "tin-validator"
GITHUB_URL = "https://github.com/bigscience-workshop/tin-validator"

# --------------------------------------------------------------------


def get_version(filename="src/tin_validator/__init__.py"):
    """
    Read the package version without importing the package, since that
    needs the runtime requirements
    """
    with io.open(filename, "r", encoding="utf-8") as f:
        return re.search(r"^VERSION = \"([^\"]+)\"", f.read(), flags=re.M).group(1)


VERSION = get_version()

PYTHON_VERSION = (3, 8)

if sys.version_info < PYTHON_VERSION:
    sys.exit(
        "**** Sorry, {} {} needs at least Python {}".format(
            PKGNAME, VERSION, ".".join(map(str, PYTHON_VERSION))
        )
    )


def requirements(filename="requirements.txt"):
    """Read the requirements file"""
    with io.open(filename, "r") as f:
        return [line.strip() for line in f if line.strip() and line[0] != "#"]


def long_description():
    """
    Take the README and remove markdown hyperlinks
    """
    with open("README.md", "rt", encoding="utf-8") as f:
        desc = f.read()
        desc = re.sub(r"^\[ ([^\]]+) \]: \s+ \S.*\n", r"", desc, flags=re.X | re.M)
        return re.sub(r"\[ ([^\]]+) \]", r"\1", desc, flags=re.X)


# --------------------------------------------------------------------


setup_args = dict(
    # Metadata
    name=PKGNAME,
    version=VERSION,
    author="Paulo Villegas",
    author_email="paulo.vllgs@gmail.com",
    description="Validation of Tax Identification Numbers for many countries",
    long_description_content_type="text/markdown",
    long_description=long_description(),
    license="Apache",
    url=GITHUB_URL,
    download_url=GITHUB_URL + "/tarball/v" + VERSION,
    # Locate packages
    packages=find_packages("src"),  # [ PKGNAME ],
    package_dir={"": "src"},
    # Requirements
    python_requires=">=3.8",
    install_requires=requirements(),
    # Optional requirements
    extras_require={
        "test": ["pytest", "nose", "coverage"],
    },
    entry_points={
        "console_scripts": [
            "tin-check = tin_validator.app.check:main",
            "tin-info = tin_validator.app.tin_info:main",
        ]
    },
    include_package_data=False,
    package_data={},
    # Post-install hooks
    cmdclass={},
    keywords=["TIN, tax identification number, validation"],
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: Apache Software License",
        "Development Status :: 4 - Beta",
        "Topic :: Office/Business :: Financial",
    ],
)

if __name__ == "__main__":
    setup(**setup_args)
