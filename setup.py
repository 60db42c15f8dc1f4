from setuptools import setup
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="humankeys",
    version="1.0.0",
    description="Deterministic human-like keystroke sequences for mobile and desktop keyboards",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["humankeys", "humankeys.keyboard"],
    install_requires=[
        "Pillow",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
