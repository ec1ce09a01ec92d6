"""Main settings file.

Settings are split into components and combined here with
django-split-settings. Values come from the environment or from
``config/.env`` through python-decouple.
"""

import django_stubs_ext
from split_settings.tools import include, optional

# Allows generic annotations such as ``admin.ModelAdmin[StoredFile]``
django_stubs_ext.monkeypatch()

include(
    'components/common.py',
    'components/logging.py',
    'components/files.py',
    # Local overrides, never committed
    optional('components/local.py'),
)
