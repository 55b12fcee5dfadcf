from setuptools import setup, find_packages

setup(
    name="langnews",
    version="0.1.0",
    description="Scrapers that turn programming language news into Markdown articles for a static site",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.10.0",
        "beautifulsoup4>=4.10.0",
        "html2text>=2020.1.16",
        "webdriver-manager>=3.5.2",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'langnews=langnews.__main__:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
