"""使用示例：演示如何调用派对策划助手API"""
import asyncio
import httpx
import json


async def example_party_plan():
    """示例：生成三种风格的派对方案"""
    base_url = "http://localhost:3000/api"

    async with httpx.AsyncClient(timeout=60.0) as client:
        health = await client.get(f"{base_url}/health")
        print(f"健康检查：{health.json()}")
        print()

        for variant_index in range(3):
            print("=" * 60)
            print(f"方案风格编号：{variant_index}")
            print("=" * 60)

            response = await client.post(
                f"{base_url}/party-plan",
                json={
                    "theme": "复古街机之夜",
                    "startTime": "19:30",
                    "people": 10,
                    "variantIndex": variant_index
                }
            )
            result = response.json()
            if response.status_code != 200:
                print(f"失败（HTTP {response.status_code}）：{result.get('error')} | {result.get('detail')}")
                continue

            print(f"标题：{result.get('title')}")
            print(f"氛围：{result.get('vibe')}  时长：{result.get('durationText')}  人数：{result.get('peopleText')}")
            for entry in result.get("timeline", []):
                print(f"  {entry.get('time')}  {entry.get('label')}：{entry.get('detail')}")
            print(f"物品清单：{json.dumps(result.get('items', []), ensure_ascii=False)}")
            print(f"建议：{result.get('tips')}")
            print()


async def example_defaults():
    """示例：不传任何字段，全部使用默认值"""
    async with httpx.AsyncClient(timeout=60.0) as client:
        response = await client.post("http://localhost:3000/api/party-plan", json={})
        print(f"默认参数响应：{json.dumps(response.json(), ensure_ascii=False, indent=2)}")


if __name__ == "__main__":
    print("派对策划助手 - API使用示例")
    print("=" * 60)
    print()

    asyncio.run(example_party_plan())

    # 取消注释以运行默认参数示例
    # asyncio.run(example_defaults())
