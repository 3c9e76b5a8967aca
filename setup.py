from setuptools import setup, find_packages

setup(
    name="thread-keys",
    version="0.1.0",
    description="Sortable hierarchy keys for threaded records",
    python_requires=">=3.8",
    # Packages live in tools/lib; tests stay beside them but are not installed
    package_dir={"": "tools/lib"},
    packages=find_packages(where="tools/lib", exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "PyYAML>=6.0",
        "jsonschema>=4.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "thread-keys=thread_keys.cli:main",
        ],
    },
)
