from setuptools import setup, find_packages

setup(
    name="md2html",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-frontmatter>=1.0.0",
        "PyYAML",
    ],
    extras_require={
        'test': ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'md2html=md2html.cli:main',
        ],
    },
    author="md2html Contributors",
    description="Convert Markdown headers, rules and paragraphs to HTML",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
)
