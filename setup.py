import re
import subprocess
from pathlib import Path

from setuptools import find_packages, setup


def get_version() -> str:
    try:
        output = subprocess.run(
            [
                "git", "--git-dir", Path(__file__).parent / ".git",
                "describe", "--tags"
            ],
            capture_output=True
        ).stdout.decode().strip().split("-")
    except FileNotFoundError:
        output = [""]
    # Output is either v1.3.5 if the tag points to the current commit or
    # something like this v1.3.5-11-g3b467ad if it doesn't

    version = ".".join(re.findall(r"\d+", output[0])) or "0.dev"
    if len(output) > 1:
        return f"{version}+{output[-1]}"
    else:
        return version


setup(
    name="nominae",
    version=get_version(),
    packages=find_packages(exclude=["tests", "tests.*"]),
    license="Apache-2.0",
    author="Hans W. Uhlig",
    description="Fantasy name generator based on the Totro algorithm",
    python_requires=">=3.9",
    install_requires=[
        "docopt",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "nominae = nominae.cli:run",
        ],
    },
)
