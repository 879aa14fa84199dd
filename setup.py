# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    "flet",
    "FletXr",

    # --- CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

extras_require = {
    # --- TESTS---
    "test": [
        "pytest",
    ],
}

setup(
    name="basics-codelab",
    version="0.1.0",
    description="Basics Codelab - onboarding and expandable greetings in Flet",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"codelab.shared.config": ["settings/*.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "codelab=codelab.app.main:run",
        ],
    },
    python_requires=">=3.10",
)
