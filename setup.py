from setuptools import setup

# Metadata goes in setup.cfg. These are here for GitHub's dependency graph.
setup(
    name="MobileDetect",
    install_requires=["MarkupSafe>=2.1.1"],
    extras_require={"tests": ["pytest"]},
)
