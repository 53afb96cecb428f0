from setuptools import find_packages, setup

# Runtime requirements for the graph component and its terminal host
base_requirements = [
    "blessed",
    "wcwidth",
]

# Requirements for development and testing
dev_requirements = [
    "pytest",
]

setup(
    name="ringgraph",
    version="0.1.0",
    description="Scrolling braille area graphs for the terminal",
    packages=find_packages(include=["ringgraph", "ringgraph.*"]),
    license="MIT",
    python_requires=">=3.8",
    install_requires=base_requirements,
    extras_require={
        "all": base_requirements + dev_requirements,
        "dev": dev_requirements,
    },
)
