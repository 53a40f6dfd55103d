import os

from setuptools import setup

about = {}
with open(os.path.join("geocodec", "_version.py")) as f:
    exec(f.read(), about)

yaml_deps = ["pyyaml"]
test_deps = ["pytest", *yaml_deps]

setup(
    name="geocodec",
    version=about["__version__"],
    description="Typed GeoJSON geometries, encoded to and decoded from plain documents",
    license="BSD",
    packages=["geocodec"],
    package_data={"geocodec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18"],
    extras_require={"yaml": yaml_deps, "test": test_deps},
)
