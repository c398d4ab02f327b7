from setuptools import setup, find_packages


setup(
    name="crypta",
    version="0.1",
    packages=find_packages(include=["crypta", "crypta.*"]),
    description="Key pair generation and anonymous public-key encryption (sealed boxes) from the command line.",
    install_requires=[
        "PyNaCl>=1.5.0",
    ],
    entry_points={
        "console_scripts": [
            "crypta=crypta.cli:main",
        ]
    },
)
