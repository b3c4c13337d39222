"""
This package contains helpful mixin classes to provide basic functionality throughout gfxmath.
"""

from gfxmath.utilities.mixin_classes.attribute_equality_comparison import AttributeEqualityComparison
from gfxmath.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["AttributeEqualityComparison", "UserOptionConfigured"]
