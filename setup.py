# -*- coding: utf-8 -*-

from setuptools import setup

extras_require = {
    "test": [
        "pytest>=6.2.5",
        "pytest-cov>=2.10",
        "pytest-xdist>=2.5",
        "hypothesis>=6.0",
    ],
    "lint": [
        "black==23.12.0",
        "flake8==6.1.0",
        "flake8-bugbear==23.12.2",
        "flake8-use-fstring==1.4",
        "isort==5.13.2",
        "mypy==1.5",
    ],
    "dev": ["ipython", "pre-commit", "twine"],
}

extras_require["dev"] = extras_require["test"] + extras_require["lint"] + extras_require["dev"]

with open("README.md", "r") as f:
    long_description = f.read()


setup(
    name="msgversions",
    version="0.1.0",
    description="Version range algebra for message schema code generators",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="msgversions contributors",
    author_email="",
    license="Apache License 2.0",
    keywords="schema protocol versions code generation",
    include_package_data=True,
    packages=["msgversions"],
    python_requires=">=3.10,<4",
    install_requires=[],
    tests_require=extras_require["test"],
    extras_require=extras_require,
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
