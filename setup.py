from setuptools import setup

setup(
    name            = "mcregion",
    version         = "1.0.0",
    description     = "Reader for Minecraft region files",
    packages        = [ "mcregion" ],
    python_requires = ">=3.6",
    zip_safe        = True,
    extras_require  = {
        "test": [ "pytest" ]
    }
)
