from setuptools import setup, find_packages

setup(
    name="trading_sim",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "loguru",
        "python-dotenv",
        "rich",
        "pydantic>=2"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "trading-sim=trading_sim.main:main"
        ]
    },
)
