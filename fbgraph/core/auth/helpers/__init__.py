"""Login helpers."""
from .redirect_login_helper import RedirectLoginHelper
from .page_tab_helper import PageTabHelper

__all__ = [
    'RedirectLoginHelper',
    'PageTabHelper',
]
