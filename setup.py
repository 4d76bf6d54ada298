from setuptools import find_packages, setup

setup(
    name="gym_buddy",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests",
        "python-dotenv",
        "couchdb",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
