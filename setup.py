from setuptools import setup, find_packages

setup(
    name="rea-advection",
    version="0.1.0",
    description="""Godunov REA finite volume schemes with TVD slope limiters for the
    linear advection equation in one and two dimensions.""",
    packages=find_packages(include=["rea_advection", "rea_advection.*"]),
    python_requires=">=3.8",
    install_requires=["numpy", "scipy", "matplotlib", "tqdm"],
    extras_require={"test": ["pytest"]},
)
