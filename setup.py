# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['short_id']

package_data = \
{'': ['*']}

install_requires = \
['pydantic>=2.0.0,<3.0.0',
 'pydantic-core>=2.0.0',
 'pydantic-settings>=2.0.0,<3.0.0',
 'python-dotenv>=0.21.0',
 'typer>=0.9.0']

extras_require = \
{'test': ['pytest>=7.0.0',
          'pytest-cov>=4.0.0',
          'nox>=2022.1.7']}

entry_points = \
{'console_scripts': ['short-id = short_id.cli:app']}

setup_kwargs = {
    'name': 'short-id',
    'version': '0.2.0',
    'description': 'Short, url-safe, random or time-ordered ids',
    'long_description': None,
    'author': 'Mark Vartanyan',
    'author_email': 'kolypto@gmail.com',
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'entry_points': entry_points,
    'python_requires': '>=3.9,<4.0',
}


setup(**setup_kwargs)
