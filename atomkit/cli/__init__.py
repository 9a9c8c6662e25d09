"""
atomkit CLI

Commands:
- atomkit inspect PLUGIN - Show deferred chains of a plugin and replay them
- atomkit version - Show version information
"""
