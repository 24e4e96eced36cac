from setuptools import setup, find_packages

setup(
    name="gcs-publish",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click",
        "python-dotenv",
        "pydantic>=2",
        "toml",
        "rich",
        "google-auth",
        "google-cloud-storage>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "gcspublish = gcspublish.main:start_cli",
        ],
    },
    description="Upload build pipeline output files to a Google Cloud Storage bucket.",
    license="MIT",
    keywords="gcs google-cloud-storage upload publish build",
)
