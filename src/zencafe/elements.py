"""Register every zencafe domain element.

Aggregates live two packages below `zencafe/`, deeper than `Domain.init()`
looks on its own, so they are imported here. Import this module before
calling `zencafe.init()`.
"""

from zencafe.catalogue.category import category, events as category_events, management  # noqa: F401
from zencafe.catalogue.product import browsing, events as product_events, product  # noqa: F401
from zencafe.catalogue.product import management as product_management  # noqa: F401
from zencafe.identity.user import upsert, user  # noqa: F401
from zencafe.messaging.contact import events as contact_events, message, submission  # noqa: F401
from zencafe.notifications.notification import (  # noqa: F401
    alerts,
    dispatch,
    events as notification_events,
    notification,
    reading,
)
from zencafe.ordering.order import (  # noqa: F401
    events as order_events,
    history,
    order,
    placement,
    pricing,
    status,
)
