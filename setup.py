from setuptools import setup, find_packages

setup(
    name="sparse_memory",
    version="0.1.0",
    packages=find_packages(exclude=["sparse_memory.tests", "sparse_memory.tests.*"]),
    package_data={"sparse_memory": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sparse_memory-demo=sparse_memory.scripts.memory_demo:main",
        ]
    },
)
