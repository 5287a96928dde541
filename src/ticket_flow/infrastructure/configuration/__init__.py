from ticket_flow.infrastructure.configuration.yaml_config_loader import YamlConfigLoader

__all__ = ["YamlConfigLoader"]
