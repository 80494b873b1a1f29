from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="pareto-efficiency",
    version="0.1.0",
    packages=find_packages(include=["pareto_efficiency", "pareto_efficiency.*"]),
    description="Pareto comparison and frontier extraction of multidimensional individuals",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"pareto_efficiency": "pareto_efficiency"},
    package_data={"pareto_efficiency.samples": ["data/*.svg"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    ],
    python_requires=">=3.7",
    install_requires=[
        "dill>=0.3.3",
        "numpy>=1.19.2",
        "tabulate>=0.8.7",
        "matplotlib>=3.3.0",
    ],
    extras_require={"test": ["pytest>=6.0"]},
    entry_points={
        "console_scripts": ["pareto-wikipedia=pareto_efficiency.samples.wikipedia:main"],
    },
)
