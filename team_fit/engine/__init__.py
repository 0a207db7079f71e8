"""Team-fit scoring engine.

Sub-modules:
- compatibility  – MBTI pair compatibility & team chemistry
- requirements   – RFP keyword topics & canonical requirements
- coverage       – domain / technical coverage of requirements
- random_source  – injectable random source for filler values
- scores         – overall score composition
- visualization  – radar / network / heatmap chart payloads
"""
