"""HexChat addon: push private messages and hilights to an ircpushd server.

Copy this file into the HexChat addons directory after installing the
ircpush package into the Python environment HexChat uses.

Commands: /ircpush_clear, /ircpush_set <setting> <value>, /ircpush_show
"""

import hexchat

from hexchat_plugin import load

__module_name__ = "ircpush"
__module_version__ = "0.3"
__module_description__ = "Sends hilighted and private messages to ircpushd."

load(hexchat)
