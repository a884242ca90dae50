from setuptools import find_packages, setup

from httpstatus import __package__ as main_package
from httpstatus import __version__ as current_version

app = f"{main_package}.__commands__"

setup(
    name="httpstatus-registry",
    version=current_version,
    description="Named HTTP response status codes with RFC references",
    license="MIT",
    keywords=["http", "status", "codes", "rfc"],
    packages=find_packages(where=".", exclude=["tests*"]),
    package_data={main_package: ["py.typed"]},
    python_requires=">=3.9.0",
    entry_points=f"""
        [console_scripts]
        {main_package}={app}:cli
    """,
    install_requires=[
        "click",
        "loguru",
        "orjson",
    ],
    extras_require={
        "tests": [
            "pytest",
            "pytest-cov",
            "Faker",
        ]
    },
    classifiers=[
        "Programming Language :: Python",
        "Intended Audience :: Developers",
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
    ],
)
