from setuptools import setup

requirements = [
    "PyQt5",
    "requests",
]

test_requirements = [
    "pytest",
    "hypothesis",
]

setup(
    name="donation_ledger",
    version="0.0.1",
    description="Donation ledger that forwards funds to a single beneficiary",
    author="Tachibana Kanade",
    author_email="h0m54r@mastodon.social",
    packages=[
        "donation_ledger",
        "donation_ledger.tests",
    ],
    entry_points={
        "console_scripts": ["donation-ledger=donation_ledger.cli:main"]
    },
    install_requires=requirements,
    extras_require={"test": test_requirements},
    python_requires=">=3.8",
    zip_safe=False,
    keywords="donation_ledger",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
)
