"""
python -m build
twine upload dist/*
"""

from setuptools import setup, find_packages


def libra_setup():
    with open("requirements.txt", "rt") as fp:
        install_requires = fp.read().strip().split("\n")

    version = "1.0.0"

    setup(
        name="libra",
        packages=find_packages(exclude=["tests", "tests.*"]),
        version=version,
        license="MIT",
        description="libra : Library REST API with field shaping, paging and HATEOAS links",
        long_description=open("README.rst").read(),
        keywords=["SqlAlchemy", "Flask", "REST", "HATEOAS", "Pagination", "JSON Patch", "Library"],
        python_requires=">=3.9, <4",
        install_requires=install_requires,
        classifiers=[
            "Development Status :: 3 - Alpha",
            "License :: OSI Approved :: MIT License",
            "Intended Audience :: Developers",
            "Framework :: Flask",
            "Environment :: Web Environment",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.9",
        ],
        entry_points={"console_scripts": ["libra=libra.__main__:main"]},
        extras_require={"test": ["pytest>=7.0"]},
    )


libra_setup()  # pragma: no cover
