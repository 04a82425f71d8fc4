"""
Launchify backend: handlers, services and data models.
Nothing in here prints or prompts; frontends supply a DecisionProvider.
"""
