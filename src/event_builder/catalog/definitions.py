"""Built-in event table: default parameters per event type and category membership.

Parameter sets follow the GA4 / Firebase recommended events.  Every
skeleton parameter starts unset (``None`` / ``""`` / ``[]``).
"""

from __future__ import annotations

from event_builder.core.enums import EventCategory, EventType
from event_builder.domain.parameters import (
    Item,
    OptionalNumberParameter,
    OptionalStringParameter,
    Parameter,
    RequiredArrayParameter,
)


def _num(name: str) -> OptionalNumberParameter:
    return OptionalNumberParameter(name=name)


def _str(name: str) -> OptionalStringParameter:
    return OptionalStringParameter(name=name)


def _items(name: str = "items") -> RequiredArrayParameter:
    return RequiredArrayParameter(name=name)


# ---------------------------------------------------------------------------
# Event parameters
# ---------------------------------------------------------------------------

_SUBSCRIPTION = (
    _str("product_id"), _num("price"), _num("value"),
    _str("currency"), _num("quantity"),
)
_DYNAMIC_LINK = (
    _str("source"), _str("medium"), _str("campaign"),
    _str("link_id"), _num("accept_time"),
)

DEFAULT_PARAMETERS: dict[EventType, tuple[Parameter, ...]] = {
    EventType.CUSTOM_EVENT: (),
    EventType.JOIN_GROUP: (_str("group_id"),),
    EventType.LOGIN: (_str("method"),),
    EventType.PRESENT_OFFER: (
        _str("item_id"), _str("item_name"), _str("item_category"),
        _num("quantity"), _num("price"), _num("value"), _str("currency"),
    ),
    EventType.PURCHASE: (
        _str("transaction_id"), _str("affiliation"), _num("value"),
        _str("currency"), _num("tax"), _num("shipping"), _str("coupon"),
        _items(),
    ),
    EventType.REFUND: (
        _str("transaction_id"), _num("value"), _str("currency"), _items(),
    ),
    EventType.SEARCH: (_str("search_term"),),
    EventType.SELECT_CONTENT: (_str("content_type"), _str("item_id")),
    EventType.SHARE: (_str("content_type"), _str("item_id"), _str("method")),
    EventType.SIGN_UP: (_str("method"),),
    EventType.SPEND_VIRTUAL_CURRENCY: (
        _str("item_name"), _str("virtual_currency_name"), _num("value"),
    ),
    EventType.EARN_VIRTUAL_CURRENCY: (
        _str("virtual_currency_name"), _num("value"),
    ),
    EventType.TUTORIAL_BEGIN: (),
    EventType.TUTORIAL_COMPLETE: (),
    EventType.ADD_PAYMENT_INFO: (
        _str("coupon"), _str("currency"), _num("value"),
        _str("payment_type"), _items(),
    ),
    EventType.ADD_TO_CART: (_str("currency"), _num("value"), _items()),
    EventType.ADD_TO_WISHLIST: (_str("currency"), _num("value"), _items()),
    EventType.BEGIN_CHECKOUT: (
        _str("coupon"), _str("currency"), _num("value"), _items(),
    ),
    EventType.ECOMMERCE_PURCHASE: (
        _str("transaction_id"), _num("value"), _str("currency"),
        _num("tax"), _num("shipping"), _str("coupon"), _items(),
    ),
    EventType.GENERATE_LEAD: (_str("currency"), _num("value")),
    EventType.PURCHASE_REFUND: (
        _str("transaction_id"), _num("value"), _str("currency"),
    ),
    EventType.VIEW_ITEM: (_str("currency"), _num("value"), _items()),
    EventType.VIEW_ITEM_LIST: (
        _str("item_list_id"), _str("item_list_name"), _items(),
    ),
    EventType.VIEW_SEARCH_RESULTS: (_str("search_term"),),
    EventType.LEVEL_UP: (_num("level"), _str("character")),
    EventType.POST_SCORE: (_num("score"), _num("level"), _str("character")),
    EventType.UNLOCK_ACHIEVEMENT: (_str("achievement_id"),),
    EventType.AD_EXPOSURE: (
        _str("firebase_screen"), _str("firebase_screen_id"),
        _str("firebase_screen_class"), _num("exposure_time"),
    ),
    EventType.AD_REWARD: (
        _str("ad_unit_id"), _str("reward_type"), _num("reward_value"),
    ),
    EventType.APP_EXCEPTION: (_num("fatal"), _num("timestamp")),
    EventType.APP_STORE_REFUND: _SUBSCRIPTION,
    EventType.APP_STORE_SUBSCRIPTION_CANCEL: (
        *_SUBSCRIPTION, _str("cancellation_reason"),
    ),
    EventType.APP_STORE_SUBSCRIPTION_CONVERT: _SUBSCRIPTION,
    EventType.APP_STORE_SUBSCRIPTION_RENEW: (*_SUBSCRIPTION, _num("renewal_count")),
    EventType.DYNAMIC_LINK_APP_OPEN: _DYNAMIC_LINK,
    EventType.DYNAMIC_LINK_APP_UPDATE: _DYNAMIC_LINK,
    EventType.DYNAMIC_LINK_FIRST_OPEN: _DYNAMIC_LINK,
}

# Skeleton for one entry of an ``items`` array.
ITEM_TEMPLATE = Item(
    parameters={
        p.name: p
        for p in (
            _str("item_id"), _str("item_name"), _str("item_brand"),
            _str("item_category"), _str("item_variant"), _num("price"),
            _num("quantity"), _str("coupon"),
        )
    },
)


# ---------------------------------------------------------------------------
# Category membership
# ---------------------------------------------------------------------------

_COMMERCE = (
    EventType.ADD_PAYMENT_INFO,
    EventType.ADD_TO_CART,
    EventType.ADD_TO_WISHLIST,
    EventType.BEGIN_CHECKOUT,
    EventType.ECOMMERCE_PURCHASE,
    EventType.GENERATE_LEAD,
    EventType.PURCHASE_REFUND,
    EventType.VIEW_ITEM,
    EventType.VIEW_ITEM_LIST,
)

DEFAULT_MEMBERSHIP: dict[EventCategory, tuple[EventType, ...]] = {
    EventCategory.CUSTOM: (EventType.CUSTOM_EVENT,),
    EventCategory.ALL_APPS: (
        EventType.JOIN_GROUP,
        EventType.LOGIN,
        EventType.PRESENT_OFFER,
        EventType.PURCHASE,
        EventType.REFUND,
        EventType.SEARCH,
        EventType.SELECT_CONTENT,
        EventType.SHARE,
        EventType.SIGN_UP,
        EventType.SPEND_VIRTUAL_CURRENCY,
        EventType.TUTORIAL_BEGIN,
        EventType.TUTORIAL_COMPLETE,
    ),
    EventCategory.RETAIL_ECOMMERCE: (*_COMMERCE, EventType.VIEW_SEARCH_RESULTS),
    EventCategory.JOBS_EDUCATION_REAL_ESTATE: _COMMERCE,
    EventCategory.TRAVEL: _COMMERCE,
    EventCategory.GAMES: (
        EventType.EARN_VIRTUAL_CURRENCY,
        EventType.JOIN_GROUP,
        EventType.LEVEL_UP,
        EventType.POST_SCORE,
        EventType.SELECT_CONTENT,
        EventType.SPEND_VIRTUAL_CURRENCY,
        EventType.TUTORIAL_BEGIN,
        EventType.TUTORIAL_COMPLETE,
        EventType.UNLOCK_ACHIEVEMENT,
    ),
    EventCategory.AUTOMATICALLY_COLLECTED: (
        EventType.AD_EXPOSURE,
        EventType.AD_REWARD,
        EventType.APP_EXCEPTION,
        EventType.APP_STORE_REFUND,
        EventType.APP_STORE_SUBSCRIPTION_CANCEL,
        EventType.APP_STORE_SUBSCRIPTION_CONVERT,
        EventType.APP_STORE_SUBSCRIPTION_RENEW,
        EventType.DYNAMIC_LINK_APP_OPEN,
        EventType.DYNAMIC_LINK_APP_UPDATE,
        EventType.DYNAMIC_LINK_FIRST_OPEN,
    ),
}
