import os

from setuptools import find_packages, setup


def read_file(filename):
    """Read a file in the package."""
    full_filename = os.path.join(
        os.path.abspath(os.path.dirname(__file__)), filename
    )
    with open(full_filename) as f:
        content = f.read()
    return content


name = "cdnkeeper"
version = "0.1.0"
description = "Client library and CLI for the Fastly CDN configuration API"
long_description = read_file("README.rst")
url = "https://github.com/lsst-sqre/cdnkeeper"
author = "Association of Universities for Research in Astronomy, Inc."
author_email = "jsick@lsst.org"
license = "MIT"
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.9",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Topic :: Internet :: WWW/HTTP",
]
keywords = "fastly cdn"

# Installation (application runtime) requirements
install_requires = [
    "requests>=2.25",
    "structlog>=21.2",
    "pydantic>=2.0,<3",
    "python-dateutil>=2.8",
    "click>=8.2",
]

# Test dependencies
tests_require = [
    "pytest>=6.2",
    "responses>=0.17",
]

# Optional installation dependencies
extras_require = {
    "test": tests_require,
    # Recommended extra for development
    "dev": tests_require,
}

setup(
    name=name,
    version=version,
    description=description,
    long_description=long_description,
    long_description_content_type="text/x-rst",
    url=url,
    author=author,
    author_email=author_email,
    license=license,
    classifiers=classifiers,
    keywords=keywords,
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={"console_scripts": ["cdnkeeper = cdnkeeper.cli:main"]},
)
