from setuptools import setup, find_packages

setup(
    name="grove",
    description="Content-addressed object storage in the git format.",
    version="0.1.0",
    packages=find_packages(),
    install_requires=["structlog", "sentry-sdk", "colorama"],
    extras_require={"test": ["pytest", "py"]},
    entry_points={"console_scripts": ["grove=grove.cli:main"]},
    zip_safe=True,
)
