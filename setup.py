from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="graphwalk",
    version="0.1.0",
    author="Andrey Golovanov",
    description="Graph traversal over read-only capability interfaces: path checks, simple-path enumeration and Bellman-Ford.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.11",
    install_requires=["networkx"],
    extras_require={"test": ["pytest"]},
)
