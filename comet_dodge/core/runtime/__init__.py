"""
Runtime: settings, session state, session controller, frame ticker and main loop.
"""
