"""Simplified Chinese strings."""

TRANSLATIONS = {
    # Titles
    "label.title": "向听数练习",
    "label.subtitle": "日本立直麻将 · 手牌向听判断训练",
    "label.hand": "手牌",
    "label.you_guessed": "你的回答",
    "label.answer": "正确答案",

    # Menu
    "menu.select": "请选择:",
    "menu.practice": "开始练习",
    "menu.analyze": "分析手牌",
    "menu.settings": "设置",
    "menu.language": "语言 / Language",
    "menu.quit": "退出",

    # Prompts
    "prompt.choose": "请输入编号 (0-{n}):",
    "prompt.invalid_input": "输入无效",
    "prompt.guess": "向听数 (-1~8, 回车揭晓, q 结束):",
    "prompt.notation": "输入天凤格式手牌 (例: 123m456p789s1122z), 回车返回:",
    "prompt.press_enter": "按回车继续...",
    "prompt.next": "回车下一题, q 结束:",

    # Shanten values
    "shanten.agari": "和了",
    "shanten.tenpai": "听牌",
    "shanten.n": "{n}向听",

    # Messages
    "msg.correct": "正确!",
    "msg.wrong": "错误, 正确答案是 {answer}",
    "msg.revealed": "答案: {answer}",
    "msg.time": "用时 {seconds:.1f} 秒",
    "msg.invalid_notation": "手牌格式错误: {error}",
    "msg.invalid_size": "手牌必须为13或14张, 当前 {total} 张",
    "msg.too_many_copies": "同一种牌最多4张",
    "msg.log_saved": "练习记录已保存: {path}",
    "msg.goodbye": "再见!",
    "msg.exit": "已退出",

    # Statistics
    "stats.title": "练习统计",
    "stats.answered": "作答",
    "stats.correct": "正确",
    "stats.accuracy": "正确率",
    "stats.avg_time": "平均用时",

    # Analysis
    "analysis.title": "手牌分析",
    "analysis.form": "和牌形",
    "analysis.value": "该形向听数",
    "analysis.standard": "一般形",
    "analysis.chiitoi": "七对子",
    "analysis.kokushi": "国士无双",
    "analysis.overall": "向听数",

    # Settings
    "settings.title": "设置",
    "settings.show_numbers": "显示牌位编号",
    "settings.show_timer": "显示用时",
    "settings.hand_size": "手牌张数",
    "settings.language": "语言",
    "settings.reset": "恢复默认",
    "settings.back": "返回",
    "settings.on": "开",
    "settings.off": "关",
    "settings.saved": "设置已保存",

    # Language
    "lang.select": "选择语言 / Select language:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",

    # Honor tiles
    "tile.east": "東",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "發",
    "tile.chun": "中",
}
