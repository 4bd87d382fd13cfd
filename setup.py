from setuptools import find_packages, setup

setup(
    name="davdrop",
    version="0.1.0",
    description="Upload dropped files to a WebDAV server and link them from markdown notes",
    packages=find_packages(include=["davdrop", "davdrop.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; the code uses click.get_current_context)
        "click",  # CLI context and exceptions (typer backend)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
        "requests",  # WebDAV transport
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "davdrop=davdrop.cli:main",
        ],
    },
)
