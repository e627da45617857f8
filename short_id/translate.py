""" Translation support for short-id messages """

import gettext
from typing import Union

translation: Union[gettext.NullTranslations, gettext.GNUTranslations]

# Init translations
try:
    translation = gettext.translation('short_id')  # type: ignore[assignment]
except FileNotFoundError:
    translation = gettext.NullTranslations()  # type: ignore[assignment]

_ = translation.gettext
