"""
チェス駒モデルのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="chess-pieces",
    version="1.0.0",
    description="チェスの駒の種類と動きの判定モデル",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    py_modules=["run_demo"],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
