"""
프랑스어 발음 규칙 표와 규칙 주석기.

규칙 표는 순서가 고정된 9개의 불변 규칙으로 구성되며
프로세스 수명 동안 변경되지 않습니다. 순서는 팁 선택 순서를 결정합니다.
"""

import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .feedback_types import PronunciationRule, PronunciationTip

_FLAGS = re.IGNORECASE

RULE_TABLE: Tuple[PronunciationRule, ...] = (
    PronunciationRule(
        identifier='silent_endings',
        pattern=re.compile(r'[dtsxzp]\Z', _FLAGS),
        description="Final consonants (d, t, s, x, z, p) are usually silent in French",
        examples=("petit", "beaucoup", "temps"),
        ipa="Silent final consonants",
        mouth_position="Close your mouth naturally at the end - don't release the final consonant",
        common_mistake="English speakers often pronounce the final consonant",
    ),
    PronunciationRule(
        identifier='nasal_an',
        pattern=re.compile(r'an|en|am|em', _FLAGS),
        description="AN/EN sounds like a nasal 'ah' - don't pronounce the 'n'",
        examples=("enfant", "pendant", "temps"),
        ipa="/ɑ̃/",
        mouth_position="Open mouth wide, lower jaw, air flows through nose",
        common_mistake="Pronouncing the 'n' sound at the end",
    ),
    PronunciationRule(
        identifier='nasal_on',
        pattern=re.compile(r'on|om', _FLAGS),
        description="ON sounds like a nasal 'oh' - keep your mouth rounded",
        examples=("bon", "maison", "nom"),
        ipa="/ɔ̃/",
        mouth_position="Round lips like saying 'oh', push air through nose",
        common_mistake="Not rounding lips enough or pronouncing the 'n'",
    ),
    PronunciationRule(
        identifier='nasal_in',
        pattern=re.compile(r'in|im|ain|ein|un', _FLAGS),
        description="IN/AIN sounds like a nasal 'ah' with lips spread",
        examples=("vin", "pain", "jardin"),
        ipa="/ɛ̃/",
        mouth_position="Spread lips as if smiling, push air through nose",
        common_mistake="Pronouncing it like English 'in' or 'an'",
    ),
    PronunciationRule(
        identifier='french_r',
        pattern=re.compile(r'r', _FLAGS),
        description="French 'R' is pronounced in the throat, like a soft gargle",
        examples=("rouge", "partir", "merci"),
        ipa="/ʁ/",
        mouth_position="Back of tongue rises toward soft palate, slight friction in throat",
        common_mistake="Using the English 'r' sound (tongue tip curled)",
    ),
    # 'ou', 'ui' 이중자의 u는 제외하는 휴리스틱 ('eu', 'au'는 구분하지 않음)
    PronunciationRule(
        identifier='french_u',
        pattern=re.compile(r'(?<!o)u(?!i)', _FLAGS),
        description="French 'U' is pronounced with very rounded, pursed lips - different from English 'oo'",
        examples=("tu", "du", "rue"),
        ipa="/y/",
        mouth_position="Purse lips tightly as if whistling, tongue forward like saying 'ee'",
        common_mistake="Saying 'oo' instead - keep tongue forward!",
    ),
    PronunciationRule(
        identifier='liaison',
        pattern=re.compile(r's\s+[aeiouéèêëàâîïôûù]', _FLAGS),
        description="Liaison: the final 's' connects to the next word starting with a vowel, pronounced as 'z'",
        examples=("les amis", "nous avons", "très important"),
        ipa="Final consonant + vowel = liaison",
        mouth_position="Smoothly connect words without pausing",
        common_mistake="Pausing between words or skipping the liaison",
    ),
    PronunciationRule(
        identifier='eu_sound',
        pattern=re.compile(r'eu|œu', _FLAGS),
        description="EU sounds like 'uh' with rounded lips - no English equivalent",
        examples=("deux", "bleu", "heureux"),
        ipa="/ø/ or /œ/",
        mouth_position="Round lips like 'oh' but say 'eh' - lips and tongue in different positions",
        common_mistake="Saying 'oo' or 'uh' without rounding lips",
    ),
    PronunciationRule(
        identifier='oi_sound',
        pattern=re.compile(r'oi', _FLAGS),
        description="OI is pronounced 'wa'",
        examples=("moi", "trois", "boire"),
        ipa="/wa/",
        mouth_position="Start with rounded 'w', quickly move to open 'ah'",
        common_mistake="Saying 'oy' like in English 'boy'",
    ),
)

PRONUNCIATION_RULES: Mapping[str, PronunciationRule] = MappingProxyType(
    {rule.identifier: rule for rule in RULE_TABLE}
)


def get_rule(identifier: str) -> PronunciationRule:
    """식별자로 규칙을 조회합니다. 없으면 KeyError."""
    return PRONUNCIATION_RULES[identifier]


def matching_rules(phrase: Optional[str]) -> List[PronunciationRule]:
    """구문에 일치하는 규칙들을 표 순서대로 반환합니다."""
    if not phrase:
        return []
    return [rule for rule in RULE_TABLE if rule.matches(phrase)]


def applicable_rules(phrase: Optional[str]) -> List[PronunciationTip]:
    """
    구문에 적용되는 발음 팁 목록.

    한 구문이 여러 규칙에 일치하면 모두 포함하며 중복을 제거하지 않습니다.

    Args:
        phrase: 프랑스어 구문

    Returns:
        표 순서대로 정렬된 PronunciationTip 리스트 (입력이 비어 있으면 빈 리스트)
    """
    return [rule.to_tip() for rule in matching_rules(phrase)]
