# setup.py
from setuptools import setup, find_packages

setup(
    name="minipy",
    version="0.1.0",
    description="Evaluation core of a small Python-like scripting language",
    packages=find_packages(include=["minipy", "minipy.*", "minipy_server", "minipy_server.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minipy = minipy.repl:main",
            "minipy-server = minipy_server.repl_server:main",
        ],
    },
    zip_safe=False,
)
