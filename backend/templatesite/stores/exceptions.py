class StoreError(Exception):
    """Generic I/O failure talking to the content database."""


class SettingsStoreError(StoreError):
    pass


class ContentStoreError(StoreError):
    pass
