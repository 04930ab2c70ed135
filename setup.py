from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("netlinx_compile", "./src/netlinx_compile/__init__.py")
netlinx_compile = ModuleType(loader.name)
loader.exec_module(netlinx_compile)

setup(
    name="netlinx-compile",
    version=netlinx_compile.__version__,  # type: ignore
    description="Driver for the NetLinx compiler, natively or through Wine.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    entry_points={
        "console_scripts": ["netlinx-compile=netlinx_compile.cli:main"]
    },
    install_requires=["appdirs", "cyclopts>=3", "pydantic>=2.10", "PyYAML", "rich"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
    ],
)
