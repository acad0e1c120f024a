#!/usr/bin/env python3
"""
Setup script for Hand Gesture Announcer
"""

from pathlib import Path

from setuptools import setup, find_packages


def read_requirements():
    """Read runtime requirements from requirements.txt"""
    path = Path(__file__).parent / "requirements.txt"
    lines = path.read_text().splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


setup(
    name="gesture-announcer",
    version="0.1.0",
    description="Classifies webcam hand poses into named gestures and announces each change on screen and by voice",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=read_requirements(),
    package_data={"gesture_announcer": ["config.default.yaml"]},
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gesture-announcer=gesture_announcer.main:run",
        ],
    },
)
