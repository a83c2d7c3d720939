"""大富豪 (Daifugo) 四人对局：规则引擎 + 终端/浏览器界面"""
