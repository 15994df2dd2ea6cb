# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common utilities and constants for the AWQL driver.

This module contains shared constants used across the driver.
"""
