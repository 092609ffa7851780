#!/usr/bin/env python
from setuptools import setup

VERSION = "0.1.0"

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="json-api-doc",
    version=VERSION,
    description="Create OpenAPI yaml schema documentation from a JSON API response",
    long_description=long_description,
    long_description_content_type="text/markdown",

    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",

        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX :: Linux",

        "Programming Language :: Python :: 3",
    ],

    install_requires=[
        "attrs>=18.1.0",
        "jsonschema>=2.6.0",
        "python-dateutil>=2.7.3",
        "simplejson>=3.11.1",
        "singer-python>=5.2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points="""
    [console_scripts]
    json-api-doc=json_api_doc:main
    """,
    packages=["json_api_doc"],
    package_data={
        "json_api_doc": ["default_config.json"],
    },
    include_package_data=True
)
