from setuptools import setup, find_packages

setup(
    name="poco2csla",
    version="1.0.0",
    description="poco2csla: CSLA business object generator for plain C# data classes",
    author="poco2csla Team",
    packages=find_packages(include=["poco2csla", "poco2csla.*"]),
    install_requires=[
        "tree-sitter>=0.22.0",
        "tree-sitter-c-sharp>=0.21.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
    ],
    entry_points={
        "console_scripts": [
            "poco2csla=poco2csla.cli:main",
        ],
    },
)
