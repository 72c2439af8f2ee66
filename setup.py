"""Setup script for spanner-emulator-quickstart."""
from setuptools import find_packages, setup

setup(
    name="spanner-emulator-quickstart",
    version="0.1.0",
    description=(
        "Quickstart for running Cloud Spanner against a local emulator "
        "started in Docker."
    ),
    license="Apache 2.0",
    packages=find_packages(include=["emulator_quickstart"]),
    install_requires=[
        "google-cloud-spanner>=3.55.0",
        "google-api-core",
        "google-auth",
        "testcontainers>=4.0.0",
        "docker",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "emulator-quickstart=emulator_quickstart.quickstart:main",
        ],
    },
    python_requires=">=3.10",
)
