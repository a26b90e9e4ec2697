from setuptools import setup, find_packages

setup(
    name="recursub",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "dnspython>=2.0",
        "requests",
        "backoff",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "recursub = recursub.cli:main",
        ],
    },
    author="exfil0",
    description="Recursive DNS subdomain brute-forcer",
    license="MIT",
    keywords="subdomain enumeration recon dns bruteforce",
)
