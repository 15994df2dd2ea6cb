# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utilities and adapters for the AWQL driver.

This module contains helper functions and adapters (like Pandas integration).
"""

__all__ = []
