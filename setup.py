import os

from setuptools import find_packages, setup

from version import get_version


def get_long_description():
    with open(
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.md"),
        encoding="utf8",
    ) as fp:
        return fp.read()


setup(
    name="tv-grep",
    version=get_version(),
    description="Filter XMLTV listings with a find(1) style expression",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "canonicaljson",
        "click",
        "pluggy",
    ],
    entry_points={"console_scripts": ["tv-grep=tv_grep.cli:cli"]},
    extras_require={
        "test": [
            "black",
            "coverage",
            "flake8",
            "pytest",
            "pytest-mock",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Multimedia :: Video",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
