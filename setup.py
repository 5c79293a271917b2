from setuptools import setup, find_packages

setup(
    name='hic_expected',
    version='0.1',
    packages=find_packages(include=["hic_expected", "hic_expected.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "plotly",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'hic_expected=hic_expected.__main__:main',
        ],
    },
)
