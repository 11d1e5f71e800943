"""Binary <-> YAML serializer for game projects."""
