"""Asset templates rendered by TemplateService."""
