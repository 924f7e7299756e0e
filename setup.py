import os

from setuptools import find_packages, setup

current_directory = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(current_directory, "README.md"), "r") as readme:
    package_description = readme.read()

version_string = ""
with open(os.path.join(current_directory, ".version"), "r") as version_file:
    version_string = version_file.read().strip()

setup(
    name="tagschema",
    version=version_string,
    description="Declarative, annotation-driven validation and JSON Schema generation for msgspec Structs.",
    long_description=package_description,
    long_description_content_type="text/markdown",
    author="Ada Lundhe",
    author_email="ada@hyperlight.dev",
    url="https://github.com/hyper-light/tagschema",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    keywords=[
        "pypi",
        "validation",
        "json-schema",
        "msgspec",
        "python",
    ],
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "pydantic",
        "python-dotenv",
        "orjson",
        "msgspec",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.11",
)
