from setuptools import setup, find_packages

setup(
    name="repo-size-reporter",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.25.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "black>=20.8b1",
            "isort>=5.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "repo-size=reposize.cli:main",
        ]
    },
    author="Harsh Master",
    author_email="harshmaster.h@turing.com",
    description="Report the size, language, stars and forks of GitHub repositories without cloning them",
    keywords="github, repository, size, cli",
    url="https://github.com/HarshTuring/github-code-search",
)
