# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make "src" importable when running pytest from repo root or tests/
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


WISH_62 = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE VNCLASS SYSTEM "vn_class-3.dtd">
<VNCLASS ID="wish-62">
    <MEMBERS>
        <MEMBER name="aim" wn="aim%2:31:01" grouping="aim.02"/>
        <MEMBER name="dream" wn="dream%2:36:00" grouping="dream.01"/>
        <MEMBER name="wish" wn="wish%2:37:02" grouping="wish.02"/>
        <MEMBER name="yen" wn="yen%2:37:00" grouping=""/>
    </MEMBERS>
    <THEMROLES>
        <THEMROLE type="Experiencer">
            <SELRESTRS logic="or">
                <SELRESTR Value="+" type="animate"/>
                <SELRESTR Value="+" type="organization"/>
            </SELRESTRS>
        </THEMROLE>
        <THEMROLE type="Stimulus">
            <SELRESTRS/>
        </THEMROLE>
    </THEMROLES>
    <FRAMES>
        <FRAME>
            <DESCRIPTION descriptionNumber="8.1" primary="NP V NP" secondary="NP" xtag="0.2"/>
            <EXAMPLES>
                <EXAMPLE>I wished it.</EXAMPLE>
            </EXAMPLES>
            <SYNTAX>
                <NP value="Experiencer">
                    <SYNRESTRS/>
                </NP>
                <VERB/>
                <NP value="Stimulus">
                    <SYNRESTRS>
                        <SYNRESTR Value="-" type="sentential"/>
                    </SYNRESTRS>
                </NP>
            </SYNTAX>
            <SEMANTICS>
                <PRED value="desire">
                    <ARGS>
                        <ARG type="Event" value="E"/>
                        <ARG type="ThemRole" value="Experiencer"/>
                        <ARG type="ThemRole" value="Stimulus"/>
                    </ARGS>
                </PRED>
            </SEMANTICS>
        </FRAME>
        <FRAME>
            <DESCRIPTION descriptionNumber="" primary="NP V that S" secondary="That-S" xtag=""/>
            <EXAMPLES>
                <EXAMPLE>I wished that he would come.</EXAMPLE>
            </EXAMPLES>
            <SYNTAX>
                <NP value="Experiencer"><SYNRESTRS/></NP>
                <VERB/>
                <NP value="Stimulus"><SYNRESTRS><SYNRESTR Value="+" type="that_comp"/></SYNRESTRS></NP>
            </SYNTAX>
            <SEMANTICS>
                <PRED value="desire">
                    <ARGS>
                        <ARG type="Event" value="E"/>
                        <ARG type="ThemRole" value="Experiencer"/>
                        <ARG type="ThemRole" value="Stimulus"/>
                    </ARGS>
                </PRED>
            </SEMANTICS>
        </FRAME>
    </FRAMES>
    <SUBCLASSES/>
</VNCLASS>
"""

# abstract parent with two levels of nesting
CONFINE_92 = """<?xml version="1.0" encoding="UTF-8"?>
<VNCLASS ID="confine-92">
    <MEMBERS/>
    <THEMROLES>
        <THEMROLE type="Agent"><SELRESTRS/></THEMROLE>
    </THEMROLES>
    <FRAMES>
        <FRAME>
            <DESCRIPTION descriptionNumber="0.2" primary="NP V NP" secondary="" xtag=""/>
            <EXAMPLES><EXAMPLE>They confined him.</EXAMPLE></EXAMPLES>
            <SYNTAX><NP value="Agent"><SYNRESTRS/></NP><VERB/><NP value="Theme"><SYNRESTRS/></NP></SYNTAX>
            <SEMANTICS><PRED value="cause"><ARGS><ARG type="ThemRole" value="Agent"/></ARGS></PRED></SEMANTICS>
        </FRAME>
    </FRAMES>
    <SUBCLASSES>
        <VNSUBCLASS ID="confine-92-1">
            <MEMBERS>
                <MEMBER name="commit" wn="commit%2:41:00" grouping="commit.03"/>
                <MEMBER name="wish" wn="" grouping=""/>
            </MEMBERS>
            <THEMROLES/>
            <FRAMES>
                <FRAME>
                    <DESCRIPTION descriptionNumber="0.2" primary="NP V NP" secondary="" xtag=""/>
                    <EXAMPLES><EXAMPLE>He committed him.</EXAMPLE></EXAMPLES>
                    <SYNTAX><NP value="Agent"/><VERB/><NP value="Theme"/></SYNTAX>
                    <SEMANTICS><PRED value="location"/></SEMANTICS>
                </FRAME>
            </FRAMES>
            <SUBCLASSES>
                <VNSUBCLASS ID="confine-92-1-1">
                    <MEMBERS>
                        <MEMBER name="institutionalize" wn="institutionalize%2:41:00" grouping=""/>
                    </MEMBERS>
                    <THEMROLES/>
                    <FRAMES/>
                    <SUBCLASSES/>
                </VNSUBCLASS>
            </SUBCLASSES>
        </VNSUBCLASS>
        <VNSUBCLASS ID="confine-92-2">
            <MEMBERS>
                <MEMBER name="jail" wn="jail%2:41:00" grouping=""/>
            </MEMBERS>
            <THEMROLES/>
            <FRAMES/>
            <SUBCLASSES/>
        </VNSUBCLASS>
    </SUBCLASSES>
</VNCLASS>
"""


def write_corpus(directory: Path, docs: dict) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in docs.items():
        (directory / name).write_text(text, encoding="utf-8")
    return directory


@pytest.fixture()
def corpus_dir(tmp_path: Path) -> Path:
    return write_corpus(tmp_path / "verbnet", {"confine-92.xml": CONFINE_92, "wish-62.xml": WISH_62})


@pytest.fixture()
def verbnet(corpus_dir: Path):
    from verbnet import VerbNet

    return VerbNet.from_directory(corpus_dir)
