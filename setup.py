from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("gppz", "./src/gppz/__init__.py")
gppz = ModuleType(loader.name)
loader.exec_module(gppz)

setup(
    name="gppz",
    version=gppz.__version__,  # type: ignore
    description="Compile C and C++ files and run them in a terminal.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    author="m09",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    entry_points={"console_scripts": ["gppz=gppz.cli:main"]},
    install_requires=["appdirs", "cyclopts", "pydantic", "pygit2", "PyYAML", "rich"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
