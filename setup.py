import setuptools

#-------------------------------------------------------------------------------

with open("README.md") as file:
    long_description = file.read()

setuptools.setup(
    name            ="tagcat",
    version         ="0.1.0",
    description     ="factories for HTML and SVG markup nodes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license         ="MIT",
    keywords        =["html", "svg", "markup"],
    classifiers     =[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],

    python_requires =">=3.8",
    install_requires=[
        "jinja2",
        "lxml",
        "markdown",
        "pygments",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },

    packages        =setuptools.find_packages(exclude=["test", "test.*"]),
    entry_points={
        'console_scripts': [
            'tagcat=tagcat.__main__:main',
        ],
    },
)

