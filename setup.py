from setuptools import setup, find_packages

setup(
    name="genetic-selection",
    version="0.1.0",
    description="Parent selection operators for generational genetic algorithms",
    packages=find_packages(include=["genetic", "genetic.*", "utils", "config", "config.*"]),
    py_modules=["example_selection"],
    package_data={"config": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
