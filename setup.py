from setuptools import setup, find_packages

setup(
    name="mojiconv",
    description=(
        "Conversion between Unicode and Japanese legacy encodings"
        " (CP932, Shift_JIS-2004, eucJP-ms, EUC-JIS-2004)"
    ),
    long_description=open("README.rst", encoding="utf-8").read(),
    long_description_content_type="text/x-rst",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: Japanese",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing",
    ],
    use_scm_version={
        "tag_regex": r"^(?P<version>[vV]?\d+(?:\.\d+){0,2}[^\+]*)(?:\+.*)?$",
        "fallback_version": "0.1.0",
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
        "jinja2>=3.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mojiconv = mojiconv.cli:main",
        ],
    },
)
