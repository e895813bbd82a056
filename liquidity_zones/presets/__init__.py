from .contract_presets import apply_contract_preset, apply_settings_preset, resolve_preset_name

__all__ = ['apply_contract_preset', 'apply_settings_preset', 'resolve_preset_name']
