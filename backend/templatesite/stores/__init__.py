from .exceptions import StoreError, SettingsStoreError, ContentStoreError
from .settings import SqlSettingsStore
