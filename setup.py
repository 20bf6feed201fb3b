from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dexrate",
    version="0.1.0",
    description="Best compounded conversion rates over graphs of exchange rates.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"dexrate.schemas": ["*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "networkx",
        "pandas",
        "PyYAML",
        "jsonschema",
    ],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["dexrate=dexrate.cli:main"]},
)
