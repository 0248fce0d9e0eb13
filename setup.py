from setuptools import setup, find_packages


setup(
    name="efpmd",
    version="1.0.0",
    packages=find_packages("src"),
    scripts=[
        "src/scripts/efpparse",
    ],
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "ase>=3.21",
        "pyyaml",
        "hydra-core>=1.2.0",
        "hydra-colorlog>=1.1.0",
        "rich",
    ],
    include_package_data=True,
    extras_require={"test": ["pytest", "pytest-datadir"]},
    license="BSD-2-Clause",
    description="Input file loading for EFP molecular simulations",
    long_description="""
        Reads the line oriented input files of the efpmd driver, covering run options and
        fragment coordinate and velocity blocks, into a configuration record in atomic units""",
)
