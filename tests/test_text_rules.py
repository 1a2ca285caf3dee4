from fontlist.text_rules import font_family, format_title, format_usage, is_variant

SPAN = '<span class="has-text-weight-normal">'


def test_font_family_spaces():
    assert font_family("Arial Italic") == "Web_Arial_Italic"


def test_font_family_slash_and_att():
    assert font_family("AT&T PC6300") == "Web_ATT_PC6300"
    assert font_family("Amstrad PC/PPC") == "Web_Amstrad_PC-PPC"


def test_font_family_revision_stop():
    assert font_family("Kaypro2K re. G") == "Web_Kaypro2K_re_G"


def test_font_family_stray_colon():
    assert font_family("Tandy1K-II :200L") == "Web_Tandy1K-II_200L"


def test_font_family_has_no_spaces_or_slashes():
    family = font_family("ITT Xtra / Tandy 2K / Mindset")
    assert " " not in family
    assert "/" not in family


def test_format_title_on_board_video():
    n = format_title("IBM incl. on-board video")
    assert n == f"IBM includes {SPAN}on-board video</span>"


def test_format_title_parenthetical():
    n = format_title("IBM PC (CGA)")
    assert n == f"IBM PC {SPAN}(CGA)</span>"


def test_format_title_multimode_graphics_adapter():
    n = format_title("IBM PCjr Multimode Graphics Adapter type")
    assert n == f"IBM PCjr {SPAN}Multimode Graphics Adapter type</span>"


def test_format_title_parenthetical_wins_over_mga():
    n = format_title("Multimode Graphics Adapter (MGA)")
    assert n == f"Multimode Graphics Adapter {SPAN}(MGA)</span>"


def test_format_title_phrase_first_occurrence_only():
    n = format_title("system font, system font")
    assert n == f"{SPAN}system font</span>, system font"


def test_format_title_several_phrases():
    n = format_title("ATI series video BIOS, firmware and system")
    assert n == (
        f"ATI {SPAN}series video BIOS</span>, {SPAN}firmware and system</span>"
    )


def test_format_title_case_sensitive():
    assert format_title("On-Board Video") == "On-Board Video"


def test_format_title_passthrough():
    assert format_title("Compaq Portable") == "Compaq Portable"


def test_format_usage_with_and_marker():
    assert format_usage("Some w/information[?]") == "Some with information"


def test_format_usage_chars_not_expanded_twice():
    assert format_usage("256 chars") == "256 characters"
    assert format_usage("box-drawing char set") == "box-drawing character set"


def test_format_usage_existing_character_untouched():
    assert format_usage("8x8 characters") == "8x8 characters"


def test_format_usage_empty():
    assert format_usage("") == ""


def test_is_variant():
    assert is_variant("regular") is False
    assert is_variant("ibm-pc") is False
    assert is_variant("ibm-pc-2x") is True
    assert is_variant("ibm-pc-2y") is True
    assert is_variant("") is False


def test_is_variant_short_names():
    assert is_variant("-2x") is False
    assert is_variant("a-2y") is True
