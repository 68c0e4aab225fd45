import pytest

GOBLIN_HTML = """<!DOCTYPE html>
<html><head><title>Goblin | Roll20</title></head>
<body>
<h1 class="page-title"> Goblin </h1>
<div id="pagecontent">Goblins are small, black-hearted humanoids.<br><br>• Sneaky<br>• Cowardly</div>
<div class="attrList">
  <div class="attrListItem"><span class="attrName">Size</span><span class="attrValue">Small</span></div>
  <div class="attrListItem"><span class="attrName">Type</span><span class="attrValue">Humanoid</span></div>
  <div class="attrListItem"><span class="attrName">Alignment</span><span class="attrValue">Neutral Evil</span></div>
  <div class="attrListItem"><span class="attrName"> AC </span><span class="attrValue"> 15 </span></div>
  <div class="attrListItem"><span class="attrName">HP</span><span class="attrValue">7</span></div>
  <div class="attrListItem"><span class="attrName">Speed</span><span class="attrValue">30 ft.</span></div>
  <div class="attrListItem"><span class="attrName">STR</span><span class="attrValue">8</span></div>
  <div class="attrListItem"><span class="attrName">DEX</span><span class="attrValue">14</span></div>
  <div class="attrListItem"><span class="attrName">CON</span><span class="attrValue">10</span></div>
  <div class="attrListItem"><span class="attrName">INT</span><span class="attrValue">10</span></div>
  <div class="attrListItem"><span class="attrName">WIS</span><span class="attrValue">8</span></div>
  <div class="attrListItem"><span class="attrName">CHA</span><span class="attrValue">8</span></div>
  <div class="attrListItem"><span class="attrName">Skills</span><span class="attrValue">Stealth +6</span></div>
  <div class="attrListItem"><span class="attrName">Passive Perception</span><span class="attrValue">9</span></div>
  <div class="attrListItem"><span class="attrName">Languages</span><span class="attrValue">Common, Goblin</span></div>
  <div class="attrListItem"><span class="attrName">Challenge Rating</span><span class="attrValue">1/4</span></div>
  <div class="attrListItem"><span class="attrName">Token Size</span><span class="attrValue">1</span></div>
</div>
</body></html>
"""


@pytest.fixture
def goblin_html():
    return GOBLIN_HTML
