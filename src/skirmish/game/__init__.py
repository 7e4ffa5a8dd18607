"""Combat layer.

- entities/: Character, Prop and the AttackTarget union
- factions.py: faction membership helpers
- combat_rules.py: range/alliance gates, level scaling, clamping
- combat_resolver.py: resolution service with outcomes and events
- battle_calculator.py: attack forecasts
- log_manager.py: categorized combat log
- session.py: wiring of the above from a config
"""
