#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

extras_require = {
    "dev": [
        "build>=0.9.0",
        "ipython",
        "twine",
        "wheel",
    ],
    "test": [
        "pytest>=7.0.0",
        "pytest-xdist>=2.0.0",
    ],
}

extras_require["dev"] = extras_require["dev"] + extras_require["test"]

with open("./README.md") as readme:
    long_description = readme.read()

setup(
    name="parity-rpc",
    version="0.1.0",
    description="""parity-rpc: Normalization of Parity JSON-RPC results into canonical Python values.""",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=[
        "eth-hash[pycryptodome]>=0.5.1",
        "eth-utils>=2.0.0",
    ],
    extras_require=extras_require,
    python_requires=">=3.8,<4",
    license="MIT",
    zip_safe=False,
    keywords="ethereum parity json-rpc",
    packages=find_packages(exclude=["scripts", "scripts.*", "tests", "tests.*"]),
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
