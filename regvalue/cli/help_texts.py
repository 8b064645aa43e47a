# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/cli/help_texts.py

YAML_EXAMPLE = r"""
# regvalue --config regvalue.yaml decode --hex '34 12 00 00'
verbose: 1
indent: 2
default_type: REG_DWORD
# log_file: ./regvalue.log
# json_logs: true
"""

USAGE_EXAMPLES = r"""
# Decode a REG_MULTI_SZ payload
regvalue decode --type REG_MULTI_SZ --hex '61 00 00 00 62 00 00 00 00 00'

# Encode a big-endian DWORD
regvalue encode --type REG_DWORD_BIG_ENDIAN --value 0x01020304

# Encode a multi-string (repeat --value per entry)
regvalue encode --type MULTI_SZ --value viostor --value netkvm

# Show the type tag table
regvalue tags
"""
