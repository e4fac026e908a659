"""Operation helpers shared by every entity API.

Each helper validates its arguments, serializes the payload, toggles the
loading indicator, sends one request and maps the response.
"""

from .add_impl import add_impl
from .delete_impl import (
    batch_delete_impl,
    delete_by_key_impl,
    delete_by_parent_and_key_impl,
    delete_impl,
)
from .erase_impl import (
    batch_erase_impl,
    erase_all_impl,
    erase_by_key_impl,
    erase_by_parent_and_key_impl,
    erase_impl,
)
from .exists_impl import exists_by_key_impl, exists_by_parent_and_key_impl, exists_impl
from .export_impl import export_impl
from .get_impl import (
    get_by_key_impl,
    get_by_parent_and_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_info_by_parent_and_key_impl,
    get_info_impl,
    get_property_by_key_impl,
    get_property_by_parent_and_key_impl,
    get_property_impl,
)
from .import_impl import import_impl
from .list_impl import list_impl, list_info_impl
from .purge_impl import (
    batch_purge_impl,
    purge_all_impl,
    purge_by_key_impl,
    purge_by_parent_and_key_impl,
    purge_impl,
)
from .restore_impl import (
    batch_restore_impl,
    restore_all_impl,
    restore_by_key_impl,
    restore_by_parent_and_key_impl,
    restore_impl,
)
from .update_impl import (
    update_by_key_impl,
    update_by_parent_and_key_impl,
    update_impl,
    update_property_by_key_impl,
    update_property_impl,
)

__all__ = [
    "add_impl",
    "batch_delete_impl",
    "batch_erase_impl",
    "batch_purge_impl",
    "batch_restore_impl",
    "delete_by_key_impl",
    "delete_by_parent_and_key_impl",
    "delete_impl",
    "erase_all_impl",
    "erase_by_key_impl",
    "erase_by_parent_and_key_impl",
    "erase_impl",
    "exists_by_key_impl",
    "exists_by_parent_and_key_impl",
    "exists_impl",
    "export_impl",
    "get_by_key_impl",
    "get_by_parent_and_key_impl",
    "get_impl",
    "get_info_by_key_impl",
    "get_info_by_parent_and_key_impl",
    "get_info_impl",
    "get_property_by_key_impl",
    "get_property_by_parent_and_key_impl",
    "get_property_impl",
    "import_impl",
    "list_impl",
    "list_info_impl",
    "purge_all_impl",
    "purge_by_key_impl",
    "purge_by_parent_and_key_impl",
    "purge_impl",
    "restore_all_impl",
    "restore_by_key_impl",
    "restore_by_parent_and_key_impl",
    "restore_impl",
    "update_by_key_impl",
    "update_by_parent_and_key_impl",
    "update_impl",
    "update_property_by_key_impl",
    "update_property_impl",
]
