
from setuptools import setup

setup(
    name =             "mantra",
    version =          "0.1.0",
    author =           "Christoph Landgraf",
    description =      "A man page bookmarker for the terminal",
    license =          "BSD",
    packages =         ['mantra', 'mantra.term', 'mantra.windows'],
    python_requires =  ">=3.9",
    extras_require =   {'test': ['pytest']},
    entry_points =     {'console_scripts': [
        'mantra = mantra.__main__:main',
    ]}
)
