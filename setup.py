from setuptools import find_packages, setup

setup(
    name="algokit",
    version="0.1.0",
    packages=find_packages(include=["algokit", "algokit.*"]),
    python_requires=">=3.10",
    install_requires=["pydantic>=2.0", "pydantic-settings>=2.0"],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-cov",
        ]
    },
    entry_points={"console_scripts": ["algokit=algokit.cli:main"]},
)
