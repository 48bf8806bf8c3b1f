"""Japanese strings."""

TRANSLATIONS = {
    "label.title": "向聴数トレーナー",
    "label.subtitle": "リーチ麻雀 · 向聴数判定トレーニング",
    "label.hand": "手牌",
    "label.you_guessed": "あなたの回答",
    "label.answer": "正解",

    "menu.select": "選択してください:",
    "menu.practice": "練習開始",
    "menu.analyze": "手牌分析",
    "menu.settings": "設定",
    "menu.language": "言語 / Language",
    "menu.quit": "終了",

    "prompt.choose": "番号を入力 (0-{n}):",
    "prompt.invalid_input": "無効な入力です",
    "prompt.guess": "向聴数 (-1~8, Enterで答え表示, qで終了):",
    "prompt.notation": "天鳳形式で手牌を入力 (例: 123m456p789s1122z), Enterで戻る:",
    "prompt.press_enter": "Enterで続行...",
    "prompt.next": "Enterで次の問題, qで終了:",

    "shanten.agari": "和了",
    "shanten.tenpai": "聴牌",
    "shanten.n": "{n}向聴",

    "msg.correct": "正解!",
    "msg.wrong": "不正解, 正解は {answer}",
    "msg.revealed": "答え: {answer}",
    "msg.time": "{seconds:.1f} 秒",
    "msg.invalid_notation": "手牌の形式が不正です: {error}",
    "msg.invalid_size": "手牌は13枚か14枚です (現在 {total} 枚)",
    "msg.too_many_copies": "同じ牌は4枚までです",
    "msg.log_saved": "練習記録を保存しました: {path}",
    "msg.goodbye": "さようなら!",
    "msg.exit": "終了しました",

    "stats.title": "練習結果",
    "stats.answered": "回答数",
    "stats.correct": "正解数",
    "stats.accuracy": "正答率",
    "stats.avg_time": "平均時間",

    "analysis.title": "手牌分析",
    "analysis.form": "和了形",
    "analysis.value": "形ごとの向聴数",
    "analysis.standard": "一般形",
    "analysis.chiitoi": "七対子",
    "analysis.kokushi": "国士無双",
    "analysis.overall": "向聴数",

    "settings.title": "設定",
    "settings.show_numbers": "牌の番号を表示",
    "settings.show_timer": "時間を表示",
    "settings.hand_size": "手牌の枚数",
    "settings.language": "言語",
    "settings.reset": "初期設定に戻す",
    "settings.back": "戻る",
    "settings.on": "オン",
    "settings.off": "オフ",
    "settings.saved": "設定を保存しました",

    "lang.select": "言語を選択 / Select language:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",

    "tile.east": "東",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "發",
    "tile.chun": "中",
}
