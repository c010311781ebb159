"""
字表 (Catalog)

固定順序的常用漢字表，依 chars_per_exercise 切成連續的章節。
字表是編譯進套件的常數，不是執行期設定。
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from pinyindrill.config import CHARS_PER_EXERCISE
from pinyindrill.core.types import Item

# 依使用頻率排列
_COMMON_CHARACTERS = (
    "的一是不了人我在有他这为之大来以个中上们到说国和地也子时道出而要于就下得可你年生"
    "自会那后能对着事其里所去行过家十用发天如然作方成者多日都三小军二无同么经法当起与好"
    "看学进种将还分此心前面又定见只主没公从已知全第样现两外些把老问很机最开用想意长使"
    "情明性本四工点新文相动正理物回果高气手各等部体战政力五把己实合水结但业关内期提"
    "山加比被重化美代西何被由走先儿别此入给平信名次东北路声向爱打反间通常认解候马妈"
    "话利真色口音品条少母电题数利并书白女头收海金放教南尔原张决受直言候安空表完听"
    "记字活员光叫呢吗吧啊干车门万克城市立场师月民风难服往快清思亲术务色命期张写"
    "系社区友早远近飞学校朋读送请让找坐住睡吃喝买卖钱块岁今明昨周星期班级每次错"
    "红黑蓝绿黄颜花草树木鸟鱼狗猫牛羊猪云雨雪冷热春夏秋冬左右上中下里外东西南北"
    "茶饭菜米面肉鸡蛋水果汤奶酒糖盐笔纸本桌椅床灯窗房楼店院园街站票路桥河湖江岛"
    "身体头发眼睛耳朵鼻嘴脸手脚心病医药疼累忙急慢跑跳游唱歌笑哭怕喜欢希望忘准备"
    "父哥姐弟妹爷奶孩男客主同事学生老师经理司机医生护士警察工人农民商人作家记者"
    "汉语拼音声调字词句段篇课练习考试题目答案问题回答告诉知道认识明白懂会能可以"
)


def _build_catalog(chars: Iterable[str]) -> Tuple[Item, ...]:
    """去除重複與空白，保留第一次出現的順序"""
    seen = set()
    result = []
    for char in chars:
        if char.isspace() or char in seen:
            continue
        seen.add(char)
        result.append(Item(char))
    return tuple(result)


CHARACTERS: Tuple[Item, ...] = _build_catalog(_COMMON_CHARACTERS)


@dataclass(frozen=True)
class Chapter:
    """
    字表中的一個連續區段

    Attributes:
        index: 章節編號 (從 0 開始)
        start: 起始位置 (含)
        end: 結束位置 (不含)
        items: 本章的字
    """
    index: int
    start: int
    end: int
    items: Tuple[Item, ...]

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def range_label(self) -> str:
        """顯示用範圍，從 1 開始，例如 "1-100" """
        return f"{self.start + 1}-{self.end}"


def chapter_count(catalog: Sequence[Item] = CHARACTERS, size: int = CHARS_PER_EXERCISE) -> int:
    if size < 1:
        raise ValueError(f"chapter size must be >= 1, got {size}")
    return (len(catalog) + size - 1) // size


def get_chapter(
    index: int,
    catalog: Sequence[Item] = CHARACTERS,
    size: int = CHARS_PER_EXERCISE,
) -> Chapter:
    total = chapter_count(catalog, size)
    if not 0 <= index < total:
        raise IndexError(f"chapter index {index} out of range (0-{total - 1})")
    start = index * size
    end = min(start + size, len(catalog))
    return Chapter(index=index, start=start, end=end, items=tuple(catalog[start:end]))


def iter_chapters(catalog: Sequence[Item] = CHARACTERS, size: int = CHARS_PER_EXERCISE) -> List[Chapter]:
    return [get_chapter(i, catalog, size) for i in range(chapter_count(catalog, size))]
