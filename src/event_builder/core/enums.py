"""Enumerations used across the event builder."""

from enum import Enum


class EventType(str, Enum):
    """Every event kind the builder knows how to produce."""

    CUSTOM_EVENT = "custom_event"

    # All apps
    JOIN_GROUP = "join_group"
    LOGIN = "login"
    PRESENT_OFFER = "present_offer"
    PURCHASE = "purchase"
    REFUND = "refund"
    SEARCH = "search"
    SELECT_CONTENT = "select_content"
    SHARE = "share"
    SIGN_UP = "sign_up"
    SPEND_VIRTUAL_CURRENCY = "spend_virtual_currency"
    EARN_VIRTUAL_CURRENCY = "earn_virtual_currency"
    TUTORIAL_BEGIN = "tutorial_begin"
    TUTORIAL_COMPLETE = "tutorial_complete"

    # Retail / ecommerce
    ADD_PAYMENT_INFO = "add_payment_info"
    ADD_TO_CART = "add_to_cart"
    ADD_TO_WISHLIST = "add_to_wishlist"
    BEGIN_CHECKOUT = "begin_checkout"
    ECOMMERCE_PURCHASE = "ecommerce_purchase"
    GENERATE_LEAD = "generate_lead"
    PURCHASE_REFUND = "purchase_refund"
    VIEW_ITEM = "view_item"
    VIEW_ITEM_LIST = "view_item_list"
    VIEW_SEARCH_RESULTS = "view_search_results"

    # Games
    LEVEL_UP = "level_up"
    POST_SCORE = "post_score"
    UNLOCK_ACHIEVEMENT = "unlock_achievement"

    # Automatically collected
    AD_EXPOSURE = "ad_exposure"
    AD_REWARD = "ad_reward"
    APP_EXCEPTION = "app_exception"
    APP_STORE_REFUND = "app_store_refund"
    APP_STORE_SUBSCRIPTION_CANCEL = "app_store_subscription_cancel"
    APP_STORE_SUBSCRIPTION_CONVERT = "app_store_subscription_convert"
    APP_STORE_SUBSCRIPTION_RENEW = "app_store_subscription_renew"
    DYNAMIC_LINK_APP_OPEN = "dynamic_link_app_open"
    DYNAMIC_LINK_APP_UPDATE = "dynamic_link_app_update"
    DYNAMIC_LINK_FIRST_OPEN = "dynamic_link_first_open"


class EventCategory(str, Enum):
    CUSTOM = "custom"
    ALL_APPS = "all_apps"
    RETAIL_ECOMMERCE = "retail_ecommerce"
    JOBS_EDUCATION_REAL_ESTATE = "jobs_education_real_estate"
    TRAVEL = "travel"
    GAMES = "games"
    AUTOMATICALLY_COLLECTED = "automatically_collected"


class ParameterType(str, Enum):
    """Selects a parameter's value shape and serialization rule."""

    OPTIONAL_NUMBER = "optional_number"
    OPTIONAL_STRING = "optional_string"
    REQUIRED_ARRAY = "required_array"
