import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="paraxlab",
    version="0.1.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Thin lens paraxial optics: ray tracing, ABCD matrices and "
                "first order properties",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'ray tracing', 'paraxial optics',
              'thin lens', 'abcd matrix', 'cardinal points'],
    install_requires=[
        "numpy>=1.15.0",
        "pandas>=0.23.4",
        ],
    extras_require={
        'test': ["pytest"],
    },
)
