from setuptools import setup, find_packages

setup(
    name="tunegraph",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "networkx",
        "python-dotenv",
        "pyyaml",
        "loguru"
    ],
    extras_require={
        "test": ["pytest"],
    },
)
